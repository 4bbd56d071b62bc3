from .format_stream import main

main()
