"""Client platform modules: session, gateway, files, resources and auth."""
