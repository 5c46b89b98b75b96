import io
import os
import sys
import tempfile
import unittest
from contextlib import redirect_stderr, redirect_stdout
from pathlib import Path

# Add src directory to path for imports
BASE_DIR = Path(__file__).resolve().parents[1]
for p in (BASE_DIR, BASE_DIR / "tests"):
    if str(p) not in sys.path:
        sys.path.insert(0, str(p))

from app.main import attach_values, main
from mp3_fixtures import make_stream


def run(*argv):
    out, err = io.StringIO(), io.StringIO()
    with redirect_stdout(out), redirect_stderr(err):
        code = main(list(argv))
    return code, out.getvalue(), err.getvalue()


class TestCli(unittest.TestCase):
    def setUp(self):
        self.tmpdir = tempfile.TemporaryDirectory()
        self.cover = os.path.join(self.tmpdir.name, "cover.mp3")
        self.out = os.path.join(self.tmpdir.name, "out.mp3")
        Path(self.cover).write_bytes(make_stream(50))

    def tearDown(self):
        self.tmpdir.cleanup()

    def test_no_arguments(self):
        code, _, err = run()
        self.assertEqual(code, 1)
        self.assertIn("usage:", err)
        self.assertIn("-h for more help", err)

    def test_input_without_options(self):
        code, _, err = run(self.cover)
        self.assertEqual(code, 1)
        self.assertIn("usage:", err)

    def test_help(self):
        code, _, err = run("-h", "-p", self.cover)
        self.assertEqual(code, 0)
        self.assertIn("private bits of MP3", err)

    def test_unknown_option(self):
        code, _, err = run("-x", self.cover)
        self.assertEqual(code, 1)
        self.assertIn("usage:", err)

    def test_no_input_file(self):
        code, _, err = run("-p")
        self.assertEqual(code, 7)
        self.assertIn("Error: No input file specified", err)

    def test_unreadable_file(self):
        code, _, err = run("-p", os.path.join(self.tmpdir.name, "missing.mp3"))
        self.assertEqual(code, 1)
        self.assertIn("Error:", err)

    def test_not_an_mp3(self):
        junk = os.path.join(self.tmpdir.name, "junk.mp3")
        Path(junk).write_bytes(bytes(1000))
        code, _, err = run("-p", junk)
        self.assertEqual(code, 4)
        self.assertIn("Error: Not an MP3 file", err)

    def test_print_clean_file(self):
        code, out, _ = run("-p", self.cover)
        self.assertEqual(code, 0)
        self.assertIn('File "cover.mp3" loaded, 50 bits available (6 bytes)', out)
        self.assertIn("The file contains no hidden data", out)

    def test_embed_then_print(self):
        code, _, _ = run("-s", "Stego", "-o", self.out, self.cover)
        self.assertEqual(code, 0)
        code, out, _ = run("-p", self.out)
        self.assertEqual(code, 0)
        self.assertIn("Hidden data:\nStego\n", out)

    def test_embed_too_large(self):
        code, _, err = run("-s", "Stegano", "-o", self.out, self.cover)
        self.assertEqual(code, 5)
        self.assertIn("Insufficient space in file", err)
        self.assertFalse(os.path.exists(self.out))

    def test_string_without_output_does_nothing(self):
        code, _, _ = run("-s", "Stego", self.cover)
        self.assertEqual(code, 0)
        self.assertEqual(Path(self.cover).read_bytes(), make_stream(50))

    def test_framed_round_trip(self):
        big = os.path.join(self.tmpdir.name, "big.mp3")
        Path(big).write_bytes(make_stream(120))
        code, _, _ = run("--framed", "-s", "hi there", "-o", self.out, big)
        self.assertEqual(code, 0)
        code, out, _ = run("--framed", "-p", self.out)
        self.assertEqual(code, 0)
        self.assertIn("Hidden data:\nhi there\n", out)

    def test_config_file_sets_framing(self):
        cfg = os.path.join(self.tmpdir.name, "cfg.yaml")
        Path(cfg).write_text("length_prefixed: true\n")
        big = os.path.join(self.tmpdir.name, "big.mp3")
        Path(big).write_bytes(make_stream(120))
        self.assertEqual(run("--config", cfg, "-s", "abc", "-o", self.out, big)[0], 0)
        code, out, _ = run("--framed", "-p", self.out)
        self.assertIn("Hidden data:\nabc\n", out)

    def test_bad_config(self):
        code, _, err = run("--config", os.path.join(self.tmpdir.name, "nope.yaml"), "-p", self.cover)
        self.assertEqual(code, 8)
        self.assertIn("Cannot load config", err)

    def test_unknown_encoding_in_config(self):
        cfg = os.path.join(self.tmpdir.name, "cfg.yaml")
        Path(cfg).write_text("encoding: no-such-codec\n")
        code, _, err = run("--config", cfg, "-p", self.cover)
        self.assertEqual(code, 8)
        self.assertIn("Error: unknown encoding", err)

    def test_string_not_encodable(self):
        cfg = os.path.join(self.tmpdir.name, "cfg.yaml")
        Path(cfg).write_text("encoding: ascii\n")
        code, _, err = run("--config", cfg, "-s", "\u00e9", "-o", self.out, self.cover)
        self.assertEqual(code, 9)
        self.assertEqual(len(err.strip().splitlines()), 1)
        self.assertTrue(err.startswith("Error: Can't encode the stego string as ascii"))
        self.assertFalse(os.path.exists(self.out))

    def test_dash_prefixed_string(self):
        code, _, err = run("-s", "-hi", "-o", self.out, self.cover)
        self.assertEqual(code, 0, err)
        code, out, _ = run("-p", self.out)
        self.assertEqual(code, 0)
        self.assertIn("Hidden data:\n-hi\n", out)

    def test_verbose_alone_loads_file(self):
        code, out, _ = run("-v", self.cover)
        self.assertEqual(code, 0)
        self.assertIn("loaded, 50 bits available", out)

    def test_framed_alone_loads_file(self):
        code, out, _ = run("--framed", self.cover)
        self.assertEqual(code, 0)
        self.assertIn("loaded, 50 bits available", out)

    def test_config_alone_loads_file(self):
        cfg = os.path.join(self.tmpdir.name, "cfg.yaml")
        Path(cfg).write_text("")
        code, out, _ = run("--config", cfg, self.cover)
        self.assertEqual(code, 0)
        self.assertIn("loaded, 50 bits available", out)

    def test_long_options_not_abbreviated(self):
        cfg = os.path.join(self.tmpdir.name, "cfg.yaml")
        Path(cfg).write_text("")
        for argv in (("--fr", "-p", self.cover), ("--con", cfg, "-p", self.cover)):
            with self.subTest(argv=argv):
                code, _, err = run(*argv)
                self.assertEqual(code, 1)
                self.assertIn("usage:", err)


class TestAttachValues(unittest.TestCase):
    def test_dash_values(self):
        self.assertEqual(attach_values(["-s", "-hi", "-o", "-out.mp3", "in.mp3"]),
                         ["-s=-hi", "-o=-out.mp3", "in.mp3"])

    def test_option_as_value(self):
        self.assertEqual(attach_values(["-s", "-o", "in.mp3"]), ["-s=-o", "in.mp3"])

    def test_trailing_option_untouched(self):
        self.assertEqual(attach_values(["-p", "in.mp3", "-s"]), ["-p", "in.mp3", "-s"])

    def test_stops_at_double_dash(self):
        self.assertEqual(attach_values(["-p", "--", "-s", "x"]), ["-p", "--", "-s", "x"])


if __name__ == "__main__":
    unittest.main()
