"""owo.io – tree walking, file reading, documents and output writing."""
