import unittest

from rttm.errors import ParseFloatError, ParseIntError, RttmError, RttmIOError, SegmentAlignmentError


class TestRttmErrors(unittest.TestCase):
    def test_messages(self):
        cases = [
            (SegmentAlignmentError(11), "Index overflow: expected 10 values, got 11"),
            (RttmIOError(FileNotFoundError("no such file")), "IO error: no such file"),
            (ParseFloatError(ValueError("invalid float literal")), "Float parse error: invalid float literal"),
            (ParseIntError(ValueError("invalid digit found in string")), "Integer parse error: invalid digit found in string"),
        ]
        for error, expected in cases:
            with self.subTest(kind=type(error).__name__):
                self.assertIsInstance(error, RttmError)
                self.assertEqual(str(error), expected)

    def test_from_os_error(self):
        cause = PermissionError(13, "Permission denied")
        error = RttmIOError.from_os_error(cause)
        self.assertIs(error.cause, cause)

    def test_from_value_error(self):
        cause = ValueError("bad")
        self.assertIs(ParseFloatError.from_value_error(cause).cause, cause)
        self.assertIs(ParseIntError.from_value_error(cause).cause, cause)

    def test_to_os_error(self):
        error = SegmentAlignmentError(11)
        converted = error.to_os_error()
        self.assertIsInstance(converted, OSError)
        self.assertEqual(str(converted), str(error))
        self.assertIs(converted.__cause__, error)


if __name__ == "__main__":
    unittest.main()
