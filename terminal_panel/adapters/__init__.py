"""
Concrete port implementations for the terminal config component.
"""
