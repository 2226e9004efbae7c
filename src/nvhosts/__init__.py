"""nvhosts: compile site definitions into NGINX vhosts backed by object storage."""

__version__ = "0.4.0"
