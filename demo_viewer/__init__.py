"""Local web viewer that lists, runs and live-reloads the scripts under demo/."""
