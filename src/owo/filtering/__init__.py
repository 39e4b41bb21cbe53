"""owo.filtering – ignore patterns, .gitignore rules and the path filter."""
