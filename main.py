#!/usr/bin/env python3
"""
cf - Main Entry Point

This is the main entry point for the cf tool.
It can be run directly or imported as a module.
"""

from cf_dns.cli.main import main

if __name__ == "__main__":
    main()
