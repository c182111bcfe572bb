import argparse
import os
import sys

class Tools:
    def __init__(self, reporter):
        self.reporter = reporter

    def parseargs(self, argv = None):
        """
        return the parsed command line: input, output and the --ast flag
        """
        parser = argparse.ArgumentParser(prog = os.path.basename(sys.argv[0]))

        parser.add_argument('input', help = 'input file (.sl)')
        parser.add_argument('output', nargs = '?', default = None,
                            help = 'output file, stdout if omitted')
        parser.add_argument('--ast', action = 'store_true',
                            help = 'print the parsed ast before the assembly')

        args = parser.parse_args(argv)

        if os.path.splitext(args.input)[1].lower() != '.sl':
            self.reporter.log(f"expected '.sl' file, got {args.input}")

        return args

    def writeasm(self, asm, filename = None):
        """
        write the assembly lines to filename, or stdout without one
        """
        text = "\n".join(asm) + "\n"

        if filename is None:
            sys.stdout.write(text)
            return

        try:
            with open(filename, "w") as f:
                f.write(text)

        except OSError as e:
            self.reporter.crash(f"cannot write output file {filename}: {e}")
