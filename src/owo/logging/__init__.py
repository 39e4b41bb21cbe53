"""owo.logging – logger configuration helpers."""
