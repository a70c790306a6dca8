from faxbits.cli import main

main()
