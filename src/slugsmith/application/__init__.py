"""Application layer – slug use cases built on the kernel ports."""
