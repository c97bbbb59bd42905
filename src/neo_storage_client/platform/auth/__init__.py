"""Account signup, login and logout."""
