"""script_gate — serves a single script to DRM-verified clients."""
