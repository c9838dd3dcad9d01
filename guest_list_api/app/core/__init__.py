"""Configuration, logging and error primitives shared by the whole app."""
