"""Budget allocation, goal projection and profile storage for a personal budgeting app."""
