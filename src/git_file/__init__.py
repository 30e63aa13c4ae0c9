"""Track single files from other git repositories, pinned to a commit."""
