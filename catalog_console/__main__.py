from catalog_console.app.main import main

main()
