from sl.tools       import Tools
from sl.parser      import Parser
from sl.reporter    import Reporter, CompileError

def main(argv = None):
    """
    usage:
    python3 slc.py <filename>.sl [<output>.asm] [--ast]

    writes the assembly to <output>.asm, or to stdout without one
    """
    # preliminary objects
    reporter    = Reporter()
    tools       = Tools(reporter)
    parser      = Parser(reporter)

    # parse args
    reporter.checkpoint("parsing args")
    args = tools.parseargs(argv)

    try:
        # filename to ast
        reporter.checkpoint("ast gen")
        prgm = parser.to_prgm(args.input)

        if args.ast:
            print("=== Parsed AST ===")
            print(prgm.pprint())
            if args.output is None:
                print("\n=== Generated assembly (stdout) ===")

        # ast to asm
        reporter.checkpoint("asm gen")
        asm = prgm.to_asm()

    except CompileError as e:
        reporter.crash(e)

    # asm to output
    reporter.checkpoint("write")
    tools.writeasm(asm, args.output)

    reporter.checkpoint("end")


if __name__ == "__main__":
    main()
