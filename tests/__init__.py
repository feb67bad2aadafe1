"""
MyShell Test Suite
Unit tests for the dispatcher, gates and command handlers
"""

import sys
import os
import unittest

# Add MyShell to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

def run_all_tests():
    """Run all MyShell tests"""
    loader = unittest.TestLoader()
    suite = loader.discover('tests', pattern='test_*.py')
    runner = unittest.TextTestRunner(verbosity=2)
    return runner.run(suite)

if __name__ == '__main__':
    run_all_tests()
