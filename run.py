#!/usr/bin/env python3
"""
Convenience wrapper for tradejournal.run module.
Allows running: python run.py [command]
Instead of: python -m tradejournal.run [command]
"""

if __name__ == "__main__":
    from tradejournal.run import main
    main()
