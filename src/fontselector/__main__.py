from fontselector.cli import main


main()
