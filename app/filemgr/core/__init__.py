"""Core modules for filemgr: configuration, paths, logging and theme."""
