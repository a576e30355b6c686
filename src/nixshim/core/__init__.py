"""Core of nixshim: argument rewriting and the pieces around it."""
