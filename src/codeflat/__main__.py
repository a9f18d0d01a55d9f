from codeflat.cli import main

main()
