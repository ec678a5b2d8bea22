"""Constants for brewstep."""

# Seconds between clock ticks. Lower it to speed through a recipe while debugging.
DEFAULT_TICK_INTERVAL = 1.0

CONFIG_FILENAME = "brewstep.toml"
DEFAULT_RECIPE = "aeropress.toml"

# Extra ticks a simulation waits past the last threshold before declaring a stall
SIMULATION_GRACE_TICKS = 1
