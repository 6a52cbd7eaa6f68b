"""Command-line subcommands for SatLayout"""
