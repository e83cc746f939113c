#!/usr/bin/env python3
"""
Tool server launcher
Serves get_current_time, calculate_sum, echo_message and fetch_data over MCP on stdio
"""
import os

# Fix encoding issues on servers with ASCII locale
os.environ.setdefault('PYTHONIOENCODING', 'utf-8')

from toolserver.main import run

if __name__ == "__main__":
    run()
