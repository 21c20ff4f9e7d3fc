import unittest
import sys

if __name__ == "__main__":
    # Discover tests in the 'tests' directory
    # It will look for files named test*.py
    loader = unittest.TestLoader()
    suite = loader.discover('tests', top_level_dir='.')

    runner = unittest.TextTestRunner(verbosity=2)
    result = runner.run(suite)

    # Exit with an appropriate code: 0 for success, 1 for failure
    sys.exit(0 if result.wasSuccessful() else 1)
