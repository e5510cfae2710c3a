"""
Main entry point for FX Chart Analyzer.

Analyze a forex chart screenshot with Google Gemini from the command line.
"""

import sys

from modules.fx_chart_analyzer.cli.main import main

if __name__ == "__main__":
    sys.exit(main())
