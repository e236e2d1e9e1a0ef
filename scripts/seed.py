#!/usr/bin/env python3
"""
Seed Script

Replaces everything in users/companies/jobs/applications with demo data.
All demo accounts log in with the password 123456.
Usage: python scripts/seed.py
"""
import sys
sys.path.insert(0, '.')

from jobboard_seed.main import main


if __name__ == "__main__":
    sys.exit(main())
