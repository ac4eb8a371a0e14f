"""Feature modules for puppet-strings."""
