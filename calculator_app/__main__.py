from calculator_app.main import main

main()
