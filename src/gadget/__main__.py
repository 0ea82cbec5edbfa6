from gadget.cli import main

main()
