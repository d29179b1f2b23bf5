"""Bootstrap pyenv, a pinned Python runtime and a virtualenv tool."""
