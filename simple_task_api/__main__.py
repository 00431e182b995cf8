from simple_task_api.cli import main

main()
