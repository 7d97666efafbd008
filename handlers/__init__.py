"""
handlers/ - Presentation Layer
================================
Interactive console menus. Each handler reads user input,
delegates to the appropriate Service, and prints the result.
No business logic lives here.
"""
