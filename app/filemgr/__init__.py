"""filemgr - scan a directory and run batch delete/rename on selected entries."""

__version__ = "0.1.0"
