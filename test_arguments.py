import unittest

from core.arguments import (
    parse, read_arguments, extract_opened_url, filter_arguments,
    decode_argument, FORWARD_ARGUMENT_COUNT,
)
from core.assertion import AssertionFailure, CollectingSink


class TestOpenedUrl(unittest.TestCase):
    def test_url_after_separator(self):
        self.assertEqual(parse(["exe", "--", "ton://abc"]).opened_url, "ton://abc")

    def test_last_argument_wins(self):
        self.assertEqual(parse(["exe", "foo", "--", "url1", "url2"]).opened_url, "url2")

    def test_no_separator(self):
        self.assertEqual(parse(["exe", "foo"]).opened_url, "")

    def test_separator_is_last(self):
        self.assertEqual(extract_opened_url(["exe", "--"]), "")

    def test_second_separator_is_taken_as_url(self):
        self.assertEqual(extract_opened_url(["exe", "--", "--"]), "--")

    def test_tokens_before_separator_ignored(self):
        self.assertEqual(extract_opened_url(["ton://early", "--", "ton://late"]), "ton://late")


class TestReadArguments(unittest.TestCase):
    def test_one_entry_per_argument(self):
        argv = ["exe", "-a", "", "ton://x"]
        self.assertEqual(read_arguments(argv), argv)

    def test_bytes_decoded_as_utf8(self):
        self.assertEqual(decode_argument("кошелёк".encode('utf-8')), "кошелёк")

    def test_invalid_bytes_replaced(self):
        self.assertEqual(decode_argument(b"ab\xffcd"), "ab\ufffdcd")

    def test_surrogate_escaped_text_replaced(self):
        # How Python hands undecodable POSIX argv bytes to the program
        raw = b"wallet\xfe".decode('utf-8', errors='surrogateescape')
        self.assertEqual(decode_argument(raw), "wallet\ufffd")

    def test_lone_surrogate_does_not_raise(self):
        self.assertEqual(decode_argument("a\ud800b"), "a\ufffd\ufffd\ufffdb")

    def test_none_argv_is_assertion(self):
        sink = CollectingSink()
        with self.assertRaises(AssertionFailure) as ctx:
            read_arguments(None, sink)
        self.assertEqual(len(sink.records), 1)
        message, file, line = sink.records[0]
        self.assertEqual(message, "argv is not None")
        self.assertEqual(file, "arguments.py")
        self.assertGreater(line, 0)
        self.assertEqual(ctx.exception.message, "argv is not None")


class TestFilteredArguments(unittest.TestCase):
    def test_bound(self):
        for count in range(0, 5):
            argv = [f"arg{i}" for i in range(count)]
            filtered = filter_arguments(argv)
            self.assertEqual(len(filtered), min(count, FORWARD_ARGUMENT_COUNT))
            self.assertEqual(filtered, argv[:len(filtered)])

    def test_raw_values_forwarded_unmodified(self):
        argv = [b"/opt/wallet/\xff", "--", "ton://abc"]
        result = parse(argv)
        self.assertEqual(result.filtered, [b"/opt/wallet/\xff"])
        self.assertEqual(result.arguments[0], "/opt/wallet/\ufffd")

    def test_filtered_bytes_decode_for_qt(self):
        filtered = parse([b"/opt/\xd0\xba\xff", "--", "ton://abc"]).filtered
        self.assertEqual(read_arguments(filtered), ["/opt/\u043a\ufffd"])

    def test_filtered_is_a_copy(self):
        argv = ["exe", "x"]
        filtered = filter_arguments(argv)
        filtered.append("y")
        self.assertEqual(argv, ["exe", "x"])


if __name__ == '__main__':
    unittest.main()
