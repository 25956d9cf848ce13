"""Exercise grading engine for the lightsaber and PRISM tutorial exercises."""

__version__ = "0.1.0"
