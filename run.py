#!/usr/bin/env python3
"""
NFC Card Scanner - Entry Point

Run this script to start forwarding card scans, e.g.:

    python run.py --base http://localhost:8080 --game ABC123
"""

import sys
import os

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from cli.app import main

if __name__ == "__main__":
    sys.exit(main())
