from gedcom_reader.cli.app import main

main()
