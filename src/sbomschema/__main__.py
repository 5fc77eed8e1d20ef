from sbomschema.cli import main

main()
