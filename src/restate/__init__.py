"""restate - property listings and detail views over an Appwrite document store."""

__version__ = "0.1.0"
