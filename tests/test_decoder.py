import json
import unittest

from cDash.decoder import decode_record, decode_records


def record_line(**overrides):
    record = {
        "Command": "\"nginx -g 'daemon of…\"",
        "CreatedAt": "2024-05-05 12:34:56 +0000 UTC",
        "ID": "abc123",
        "Image": "nginx:latest",
        "Labels": "",
        "Names": "web",
        "Ports": "0.0.0.0:8080->80/tcp",
        "Status": "Up 2 hours",
    }
    record.update(overrides)
    return json.dumps(record)


class TestDecodeRecord(unittest.TestCase):

    def test_decodes_all_fields(self):
        record = decode_record(record_line())
        self.assertEqual(record.id, "abc123")
        self.assertEqual(record.image, "nginx:latest")
        self.assertEqual(record.command, "\"nginx -g 'daemon of…\"")
        self.assertEqual(record.created_at, "2024-05-05 12:34:56 +0000 UTC")
        self.assertEqual(record.status, "Up 2 hours")
        self.assertEqual(record.ports, "0.0.0.0:8080->80/tcp")
        self.assertEqual(record.names, "web")

    def test_rejects_malformed_lines(self):
        bad_lines = [
            "",
            "   ",
            "not json",
            '{"ID": "abc123"',
            "[1, 2, 3]",
            '"a string"',
            record_line(ID=""),
            record_line(Status=5),
            json.dumps({"ID": "abc123", "Image": "nginx"}),
        ]
        for line in bad_lines:
            with self.subTest(line=line):
                self.assertIsNone(decode_record(line))


class TestDecodeRecords(unittest.TestCase):

    def test_keeps_order_and_skips_bad_lines(self):
        text = "\n".join([
            record_line(ID="abc123"),
            "garbage",
            record_line(ID=""),
            record_line(ID="def456"),
            "",
        ])
        records = decode_records(text)
        self.assertEqual([r.id for r in records], ["abc123", "def456"])

    def test_empty_output(self):
        self.assertEqual(decode_records(""), [])
        self.assertEqual(decode_records("\n\n"), [])


if __name__ == "__main__":
    unittest.main()
