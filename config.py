# Global configuration for the base-encoded share reconstructor
import os

ROOT_DIR = os.path.dirname(os.path.abspath(__file__))

class Config:
    # Share format
    METADATA_KEY = "keys"  # Holds {"k": ..., "n": ...}, never a share
    MIN_BASE = 2
    MAX_BASE = 36

    # Fixtures
    TESTCASE_DIR = os.environ.get("BASESECRET_TESTCASE_DIR", os.path.join(ROOT_DIR, "testcases"))
    TESTCASE_PATTERN = "testcase{}.json"

    # Logging
    LOG_LEVEL = os.environ.get("BASESECRET_LOG_LEVEL", "WARNING").upper()
    LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"

    # Research parameters
    PERFORMANCE_SAMPLES = 100  # For benchmarking

    @classmethod
    def testcase_path(cls, case_id):
        return os.path.join(cls.TESTCASE_DIR, cls.TESTCASE_PATTERN.format(case_id))

    @classmethod
    def base_in_range(cls, base):
        return cls.MIN_BASE <= base <= cls.MAX_BASE
