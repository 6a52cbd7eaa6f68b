"""
Default data files for SatLayout
"""
import os

# Path to package data directory
DATA_DIR = os.path.dirname(os.path.abspath(__file__))

# Example batch of layout requests (one corner menu per arrangement)
DEFAULT_REQUESTS = os.path.join(DATA_DIR, 'example_requests.tsv')
