from pascal_snake.main import main

main()
