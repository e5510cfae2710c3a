"""Command-line interface for FX Chart Analyzer."""
