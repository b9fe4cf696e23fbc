"""Monitor status constants shared by the notification providers."""

DOWN = 0
UP = 1
PENDING = 2
MAINTENANCE = 3
