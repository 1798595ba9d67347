from storefront.cli.main import main

main()
