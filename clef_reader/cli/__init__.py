from .main import CLI, main

__all__ = ['CLI', 'main']
