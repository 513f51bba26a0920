"""pi-manager client — async HTTP bindings for a pi-manager backend."""
