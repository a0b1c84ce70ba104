import sys

from django.core.management.base import BaseCommand, CommandError

from matching.backend.grep_service import GrepService, GrepError
from matching.backend.regex_engine.engine import RegexEngine


def split_grep_args(parser, args):
    """
    Pull the options the parser knows (-E, -r, --verbosity ...) out of args,
    wherever they appear. Everything else is the pattern, then the files,
    even when it starts with '-'.
    """
    flags, words = [], []
    args = list(args)
    i = 0
    while i < len(args):
        arg = args[i]
        action = parser._option_string_actions.get(arg.split("=", 1)[0])
        if arg == "--":
            pass
        elif action is None:
            words.append(arg)
        else:
            flags.append(arg)
            # options like --settings X take the next argument as their value
            if action.nargs != 0 and "=" not in arg and i + 1 < len(args):
                i += 1
                flags.append(args[i])
        i += 1
    return flags, words


class Command(BaseCommand):
    help = "Print lines matching PATTERN (usage: grep -E PATTERN [-r] [FILE ...])"

    requires_system_checks = []
    # lets tests hand in their own input stream through call_command
    stealth_options = ("stdin",)

    def create_parser(self, prog_name, subcommand, **kwargs):
        parser = super().create_parser(prog_name, subcommand, **kwargs)
        parse_args = parser.parse_args

        def parse_grep_args(args=None, namespace=None):
            if args is None:
                args = sys.argv[2:]
            flags, words = split_grep_args(parser, args)
            # after "--" argparse takes every word as a positional
            return parse_args(flags + ["--"] + words, namespace)

        parser.parse_args = parse_grep_args
        return parser

    def add_arguments(self, parser):
        parser.add_argument("-E", dest="extended", action="store_true",
                            help="extended pattern syntax (required)")
        parser.add_argument("-r", dest="recursive", action="store_true",
                            help="search directories recursively")
        parser.add_argument("pattern", nargs="?",
                            help="pattern to search for")
        parser.add_argument("files", nargs="*",
                            help="files to search (standard input if none)")

    def handle(self, *args, **opts):
        if not opts["extended"]:
            raise CommandError("Expected '-E' flag", returncode=1)
        if opts["pattern"] is None:
            raise CommandError("Expected a pattern argument", returncode=1)

        engine = RegexEngine(opts["pattern"])
        files = opts["files"]

        if files:
            with_source = len(files) > 1 or opts["recursive"]
            matches = GrepService.search_files(engine, files, recursive=opts["recursive"])
        else:
            with_source = False
            stdin = opts.get("stdin") or sys.stdin
            matches = GrepService.search_lines(engine, stdin)

        any_match = False
        try:
            for m in matches:
                self.stdout.write(m.render(with_source))
                any_match = True
        except GrepError as e:
            raise CommandError(str(e), returncode=1) from e

        if not any_match:
            sys.exit(1)
