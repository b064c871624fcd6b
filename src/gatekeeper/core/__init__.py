"""Core building blocks shared by the permission and role modules."""
