#!/usr/bin/env python3
"""
Price Registry
Entry point: python -m price_registry.main <command>
"""
from .cli import main

if __name__ == "__main__":
    main()
