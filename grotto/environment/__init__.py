"""Cave level data: grid, regions, tiles and spawns."""
