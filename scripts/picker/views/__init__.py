"""Textual screens and widgets for the task picker."""
