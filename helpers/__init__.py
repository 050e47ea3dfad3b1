"""Pure helpers shared by services and views."""
