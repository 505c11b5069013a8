"""
Command Line Interface Package

CLI for the cash deposit extractor.

Command Structure:
- cashdeposit: Main entry point with utility commands (version, config)
- cashdeposit extract: Parse alert emails and print a summary
- cashdeposit export: Parse alert emails and write booking CSV files
"""
