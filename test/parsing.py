# python
"""
Parser behavioral tests (registration, queue reconstruction, population).

Scope
- Construction: null program, empty and malformed argument vectors, built-in help option.
- Registration: duplicates, None, wrong kinds, set()/restyle(), sealing after parse().
- End-to-end parses of the sample programs (mediaedit, filesearch, copy, namelookup)
  in both Unix and Windows styles.
- Failures recorded as faults: unknown options, missing option values, leftovers.
- Mandatory checks and the built-in help option.

Conventions
- Test method names follow CamelCase per project convention.
- Each test builds fresh parameters; a parser is never reused across parses.
"""

from __future__ import annotations

import unittest
from unittest import TestCase

from cmdline import (
    DuplicateOptionError,
    DuplicatePositionalError,
    EmptyArgumentsError,
    MissingOptionValueError,
    MultiPositional,
    NullParameterError,
    Option,
    OptionParam,
    Order,
    Parser,
    Positional,
    Program,
    SealedParserError,
    Status,
    Style,
    UnexpectedArgumentError,
    UnknownOptionError,
    ValueOption,
)


def media(arguments, style=Style.UNIX):
    """mediaedit: -p/--print and -e/--edit with field params, -v, <filenames>..."""
    program = Program("mediaedit", "prints and edits tags in media files")
    parser = Parser(program, arguments)
    params = {}
    for option in (
        ValueOption("p", "print", "prints the specified fields"),
        ValueOption("e", "edit", "edits the specified fields"),
    ):
        for name, description in (
            ("song", "the title of the song"),
            ("artist", "the song artist"),
            ("album", "the album of the song"),
        ):
            option.add(params.setdefault((option.long, name), OptionParam(name, description)))
        parser.add(option)
    parser.add(verbose := Option("v", "verbose", "prints verbose info"))
    parser.set(files := MultiPositional("filenames", "the media files to process", mandatory=True))
    parser.restyle(style)
    return parser, params, verbose, files


def copy(arguments, style=Style.UNIX):
    """copy: -v, <source>... <destination>"""
    parser = Parser(Program("copy", "copies one or more files to the specified destination"), arguments)
    parser.add(verbose := Option("v", "verbose", "prints verbose info"))
    parser.add(destination := Positional("destination", "the destination file path", mandatory=True))
    parser.set(source := MultiPositional("source", "the files to copy", mandatory=True, order=Order.AFTER_OPTIONS))
    parser.restyle(style)
    return parser, verbose, source, destination


def search(arguments, style=Style.UNIX):
    """filesearch: -i, <pattern> <filenames>..."""
    parser = Parser(Program("filesearch", "searches files for lines that contain a search pattern"), arguments)
    parser.add(ignore := Option("i", "ignore-case", "ignores case when searching"))
    parser.add(pattern := Positional("pattern", "the file search pattern", mandatory=True))
    parser.set(files := MultiPositional("filenames", "the files to search", mandatory=True))
    parser.restyle(style)
    return parser, ignore, pattern, files


def namelookup(arguments, style=Style.UNIX):
    """namelookup: -v, <hostname>"""
    parser = Parser(Program("namelookup", "looks up the IP address of the specified hostname"), arguments)
    parser.add(verbose := Option("v", "verbose", "prints verbose info"))
    parser.add(hostname := Positional("hostname", "the hostname to look up", mandatory=True))
    parser.restyle(style)
    return parser, verbose, hostname


class TestConstruction(TestCase):

    def testNullProgramRejected(self):
        with self.assertRaises(NullParameterError):
            Parser(None, ["prog"])

    def testProgramMustBeProgram(self):
        with self.assertRaises(TypeError):
            Parser(Positional("prog"), ["prog"])

    def testEmptyArgumentsRejected(self):
        with self.assertRaises(EmptyArgumentsError) as context:
            Parser(Program("prog"), [])
        self.assertEqual(str(context.exception), "Command line arguments can't be empty")

    def testStringArgumentsRejected(self):
        with self.assertRaises(TypeError):
            Parser(Program("prog"), "prog -v")

    def testNonStringTokensRejected(self):
        with self.assertRaises(TypeError):
            Parser(Program("prog"), ["prog", 3])

    def testHelpOptionRegisteredFirst(self):
        parser = Parser(Program("prog"), ["prog"])
        parser.add(Option("v", "verbose"))
        self.assertIs(parser.options[0], parser.help_option)
        self.assertEqual(parser.help_option.name, "-h")
        self.assertEqual(parser.help_option.long_name, "--help")
        self.assertEqual(parser.help_option.description, "prints detailed help info")
        self.assertFalse(parser.help_specified)

    def testArgumentsAreKept(self):
        parser = Parser(Program("prog"), iter(["prog", "a"]))
        self.assertEqual(parser.arguments, ["prog", "a"])
        self.assertFalse(parser.sealed)


class TestRegistration(TestCase):

    def setUp(self):
        self.parser = Parser(Program("prog"), ["prog"])

    def testDuplicateLongNameRejected(self):
        self.parser.add(Option("v", "verbose"))
        with self.assertRaises(DuplicateOptionError):
            self.parser.add(Option("x", "verbose"))

    def testDuplicateShortNameRejected(self):
        self.parser.add(Option("v", "verbose"))
        with self.assertRaises(DuplicateOptionError):
            self.parser.add(Option("v", "vocal"))

    def testHelpNamesAreTaken(self):
        with self.assertRaises(DuplicateOptionError):
            self.parser.add(Option("h", "host"))
        with self.assertRaises(DuplicateOptionError):
            self.parser.add(ValueOption(long="help"))

    def testShortOnlyOptionsDoNotClash(self):
        self.parser.add(Option("a"))
        self.parser.add(Option("b"))
        self.assertEqual(len(self.parser.options), 3)

    def testSameOptionTwiceRejected(self):
        verbose = Option("v", "verbose")
        self.parser.add(verbose)
        with self.assertRaises(DuplicateOptionError):
            self.parser.add(verbose)

    def testDuplicatePositionalRejected(self):
        self.parser.add(Positional("destination"))
        with self.assertRaises(DuplicatePositionalError):
            self.parser.add(Positional("destination"))

    def testRestyleClashRejected(self):
        self.parser.add(user := Option(long="h"))
        with self.assertRaises(DuplicateOptionError):
            self.parser.restyle(Style.WINDOWS)
        self.assertEqual(user.long_name, "--h")
        self.assertEqual(self.parser.help_option.short_name, "-h")

    def testRestyleShortLongClashRejected(self):
        self.parser.add(Option("v"))
        self.parser.add(Option(long="v"))
        with self.assertRaises(DuplicateOptionError):
            self.parser.restyle(Style.WINDOWS)
        self.assertEqual([option.style for option in self.parser.options], [Style.UNIX] * 3)

    def testNoneRejected(self):
        with self.assertRaises(NullParameterError):
            self.parser.add(None)

    def testOtherKindsRejected(self):
        for parameter in (MultiPositional("files"), Program("other"), OptionParam("song"), "-v"):
            with self.subTest(parameter=parameter):
                with self.assertRaises(TypeError):
                    self.parser.add(parameter)

    def testSetReplacesAndClears(self):
        first, second = MultiPositional("first"), MultiPositional("second")
        self.parser.set(first)
        self.parser.set(second)
        self.assertIs(self.parser.multipositional, second)
        self.parser.set(None)
        self.assertIsNone(self.parser.multipositional)

    def testSetRejectsOtherKinds(self):
        with self.assertRaises(TypeError):
            self.parser.set(Positional("files"))

    def testRestyleAppliesToEveryOption(self):
        self.parser.add(verbose := Option("v", "verbose"))
        self.parser.restyle(Style.WINDOWS)
        self.assertEqual(verbose.style, Style.WINDOWS)
        self.assertEqual(self.parser.help_option.long_name, "/help")
        with self.assertRaises(TypeError):
            self.parser.restyle("windows")

    def testSealedAfterParse(self):
        self.assertEqual(self.parser.parse(), Status.SUCCESS)
        self.assertTrue(self.parser.sealed)
        with self.assertRaises(SealedParserError):
            self.parser.parse()
        with self.assertRaises(SealedParserError):
            self.parser.add(Option("v"))
        with self.assertRaises(SealedParserError):
            self.parser.set(None)
        with self.assertRaises(SealedParserError):
            self.parser.restyle(Style.UNIX)


class TestMediaEdit(TestCase):

    def assertParsed(self, arguments, style):
        parser, params, verbose, files = media(arguments, style)
        self.assertEqual(parser.parse(), Status.SUCCESS)
        self.assertEqual(parser.program.value, "mediaedit")
        print_, edit = parser.options[1], parser.options[2]
        self.assertEqual(print_.values, ["song", "artist"])
        self.assertTrue(params["print", "song"].specified)
        self.assertTrue(params["print", "artist"].specified)
        self.assertFalse(params["print", "album"].specified)
        self.assertEqual(edit.values, ["album=Testing the Testers"])
        self.assertTrue(params["edit", "album"].specified)
        self.assertEqual(params["edit", "album"].value, "Testing the Testers")
        self.assertFalse(params["edit", "song"].specified)
        self.assertTrue(verbose.specified)
        self.assertEqual(files.values, ["Test1.mp3", "Test2.mp3"])
        self.assertTrue(parser.all_mandatory_specified())
        self.assertFalse(parser.help_specified)
        self.assertEqual(parser.faults, [])

    def testUnixArguments(self):
        self.assertParsed([
            "mediaedit", "-p", "song", "--print", "artist",
            "--edit", "album=Testing the Testers", "-v", "Test1.mp3", "Test2.mp3",
        ], Style.UNIX)

    def testWindowsArguments(self):
        self.assertParsed([
            "mediaedit", "/p", "song", "/print", "artist",
            "/edit", "album=Testing the Testers", "/v", "Test1.mp3", "Test2.mp3",
        ], Style.WINDOWS)

    def testOptionsInterleavedWithPositionals(self):
        parser, params, verbose, files = media([
            "mediaedit", "Test1.mp3", "-v", "Test2.mp3", "-p", "song",
        ])
        self.assertEqual(parser.parse(), Status.SUCCESS)
        self.assertEqual(parser.queue, ["mediaedit", "-v", "-p", "song", "Test1.mp3", "Test2.mp3"])
        self.assertEqual(files.values, ["Test1.mp3", "Test2.mp3"])
        self.assertTrue(verbose.specified)

    def testOptionShapedValueIsConsumedByValueOption(self):
        parser, params, verbose, files = media(["mediaedit", "-p", "-v", "a.mp3"])
        self.assertEqual(parser.parse(), Status.SUCCESS)
        self.assertEqual(parser.options[1].values, ["-v"])
        self.assertFalse(verbose.specified)

    def testMissingOptionValue(self):
        parser, *unused = media(["mediaedit", "a.mp3", "--print"])
        self.assertEqual(parser.parse(), Status.FAILURE)
        fault, = parser.faults
        self.assertIsInstance(fault, MissingOptionValueError)
        self.assertEqual(fault.options["token"], "--print")

    def testUnixTokensFailUnderWindowsStyle(self):
        parser, *unused = media(["mediaedit", "-v", "a.mp3"], Style.WINDOWS)
        self.assertEqual(parser.parse(), Status.FAILURE)
        self.assertIsInstance(parser.faults[0], UnknownOptionError)


class TestCopy(TestCase):

    def testUnixArguments(self):
        parser, verbose, source, destination = copy(["copy", "-v", "Source1.txt", "Source2.txt", "Destination.txt"])
        self.assertEqual(parser.parse(), Status.SUCCESS)
        self.assertEqual(parser.program.value, "copy")
        self.assertTrue(verbose.specified)
        self.assertEqual(source.values, ["Source1.txt", "Source2.txt"])
        self.assertEqual(destination.value, "Destination.txt")
        self.assertTrue(parser.all_mandatory_specified())
        self.assertEqual(parser.queue, ["copy", "-v", "Destination.txt", "Source1.txt", "Source2.txt"])

    def testWindowsArguments(self):
        parser, verbose, source, destination = copy(
            ["copy", "/verbose", "Source1.txt", "Source2.txt", "Destination.txt"], Style.WINDOWS,
        )
        self.assertEqual(parser.parse(), Status.SUCCESS)
        self.assertTrue(verbose.specified)
        self.assertEqual(source.values, ["Source1.txt", "Source2.txt"])
        self.assertEqual(destination.value, "Destination.txt")

    def testOptionAfterPositionals(self):
        parser, verbose, source, destination = copy(["copy", "Source1.txt", "Destination.txt", "-v"])
        self.assertEqual(parser.parse(), Status.SUCCESS)
        self.assertTrue(verbose.specified)
        self.assertEqual(source.values, ["Source1.txt"])
        self.assertEqual(destination.value, "Destination.txt")

    def testSingleTokenGoesToDestination(self):
        parser, verbose, source, destination = copy(["copy", "Destination.txt"])
        self.assertEqual(parser.parse(), Status.SUCCESS)
        self.assertEqual(destination.value, "Destination.txt")
        self.assertEqual(source.values, [])
        self.assertFalse(parser.all_mandatory_specified())
        self.assertEqual(parser.missing(), (source,))

    def testOnlyOptionsLeavesMandatoryUnmet(self):
        parser, verbose, source, destination = copy(["copy", "-v"])
        self.assertEqual(parser.parse(), Status.SUCCESS)
        self.assertFalse(parser.all_mandatory_specified())
        self.assertEqual(parser.missing(), (destination, source))

    def testTwoSourcesWithoutDestination(self):
        parser, verbose, source, destination = copy(["copy", "Source1.txt", "Source2.txt"])
        self.assertEqual(parser.parse(), Status.SUCCESS)
        self.assertEqual(parser.queue, ["copy", "Source2.txt", "Source1.txt"])
        self.assertEqual(source.values, ["Source1.txt"])
        self.assertEqual(destination.value, "Source2.txt")
        self.assertTrue(parser.all_mandatory_specified())

    def testQueueSurvivesPopulation(self):
        parser, verbose, source, destination = copy(["copy", "Source1.txt", "Destination.txt"])
        parser.parse()
        self.assertEqual(parser.queue, ["copy", "Destination.txt", "Source1.txt"])


class TestFileSearch(TestCase):

    def testUnixArguments(self):
        parser, ignore, pattern, files = search(
            ["filesearch", "-i", "test_pattern", "FileToSearch1.txt", "FileToSearch2.txt"],
        )
        self.assertEqual(parser.parse(), Status.SUCCESS)
        self.assertTrue(ignore.specified)
        self.assertEqual(pattern.value, "test_pattern")
        self.assertEqual(files.values, ["FileToSearch1.txt", "FileToSearch2.txt"])
        self.assertTrue(parser.all_mandatory_specified())

    def testWindowsArguments(self):
        parser, ignore, pattern, files = search(
            ["filesearch", "/ignore-case", "test_pattern", "FileToSearch1.txt"], Style.WINDOWS,
        )
        self.assertEqual(parser.parse(), Status.SUCCESS)
        self.assertTrue(ignore.specified)
        self.assertEqual(pattern.value, "test_pattern")
        self.assertEqual(files.values, ["FileToSearch1.txt"])


class TestNameLookup(TestCase):

    def testUnixArguments(self):
        parser, verbose, hostname = namelookup(["namelookup", "-v", "test.example.com"])
        self.assertEqual(parser.parse(), Status.SUCCESS)
        self.assertTrue(verbose.specified)
        self.assertEqual(hostname.value, "test.example.com")
        self.assertTrue(parser.all_mandatory_specified())

    def testMissingHostname(self):
        parser, verbose, hostname = namelookup(["namelookup", "-v"])
        self.assertEqual(parser.parse(), Status.SUCCESS)
        self.assertFalse(parser.all_mandatory_specified())
        self.assertEqual(parser.missing(), (hostname,))

    def testShortHelp(self):
        parser, verbose, hostname = namelookup(["namelookup", "-h"])
        self.assertEqual(parser.parse(), Status.SUCCESS)
        self.assertTrue(parser.help_specified)
        self.assertFalse(parser.all_mandatory_specified())

    def testLongHelpWindows(self):
        parser, verbose, hostname = namelookup(["namelookup", "/help"], Style.WINDOWS)
        self.assertEqual(parser.parse(), Status.SUCCESS)
        self.assertTrue(parser.help_specified)

    def testUnknownOption(self):
        parser, verbose, hostname = namelookup(["namelookup", "--unknown", "test.example.com"])
        self.assertEqual(parser.parse(), Status.FAILURE)
        fault, = parser.faults
        self.assertIsInstance(fault, UnknownOptionError)
        self.assertEqual(fault.options["token"], "--unknown")
        self.assertIn("--help", fault.options["hint"])
        self.assertFalse(hostname.specified)

    def testExtraPositional(self):
        parser, verbose, hostname = namelookup(["namelookup", "one.example.com", "two.example.com"])
        self.assertEqual(parser.parse(), Status.FAILURE)
        fault, = parser.faults
        self.assertIsInstance(fault, UnexpectedArgumentError)
        self.assertEqual(fault.options["token"], "two.example.com")
        self.assertEqual(hostname.value, "one.example.com")

    def testRepeatedFlagIsAccepted(self):
        parser, *unused = namelookup(["namelookup", "-v", "-v", "test.example.com"])
        self.assertEqual(parser.parse(), Status.SUCCESS)

    def testTypedProgramToken(self):
        parser, verbose, hostname = namelookup(["./bin/namelookup", "test.example.com"])
        self.assertEqual(parser.parse(), Status.SUCCESS)
        self.assertEqual(parser.program.value, "./bin/namelookup")
        self.assertEqual(parser.program.name, "namelookup")


class TestMinimal(TestCase):

    def testUnknownOptionOnBareParser(self):
        parser = Parser(Program("prog"), ["prog", "--unknown"])
        self.assertEqual(parser.parse(), Status.FAILURE)
        self.assertIsInstance(parser.faults[0], UnknownOptionError)

    def testProgramOnly(self):
        parser = Parser(Program("prog", mandatory=True), ["prog"])
        self.assertEqual(parser.parse(), Status.SUCCESS)
        self.assertTrue(parser.all_mandatory_specified())

    def testMandatoryQueryBeforeParse(self):
        parser = Parser(Program("prog", mandatory=True), ["prog"])
        self.assertFalse(parser.all_mandatory_specified())

    def testPositionalWithoutMultiTakesInOrder(self):
        parser = Parser(Program("prog"), ["prog", "a", "b"])
        parser.add(first := Positional("first"))
        parser.add(second := Positional("second"))
        self.assertEqual(parser.parse(), Status.SUCCESS)
        self.assertEqual((first.value, second.value), ("a", "b"))

    def testWildcardOptionIsNotSwallowed(self):
        parser = Parser(Program("prog"), ["prog", "a", "-?"])
        parser.add(wildcard := Option("?"))
        parser.set(files := MultiPositional("files"))
        self.assertEqual(parser.parse(), Status.SUCCESS)
        self.assertTrue(wildcard.specified)
        self.assertEqual(files.values, ["a"])

    def testWindowsWildcardOption(self):
        parser = Parser(Program("prog"), ["prog", "/?"])
        parser.add(wildcard := Option("?"))
        parser.restyle(Style.WINDOWS)
        self.assertEqual(parser.parse(), Status.SUCCESS)
        self.assertTrue(wildcard.specified)

    def testEmptyTokenIsUnexpected(self):
        parser = Parser(Program("prog"), ["prog", ""])
        parser.add(Positional("first"))
        self.assertEqual(parser.parse(), Status.FAILURE)
        self.assertIsInstance(parser.faults[0], UnexpectedArgumentError)

    def testDefinitionsOutliveParsers(self):
        verbose = Option("v", "verbose")
        for arguments in (["prog"], ["prog", "-v"]):
            parser = Parser(Program("prog"), arguments)
            parser.add(verbose)
            self.assertEqual(parser.parse(), Status.SUCCESS)
        self.assertTrue(verbose.specified)


if __name__ == "__main__":
    unittest.main()
