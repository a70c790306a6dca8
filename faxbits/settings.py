# Raise exceptions on malformed decode parameters instead of warning
# and falling back to defaults.
STRICT = False
