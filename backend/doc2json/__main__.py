from .cli import main

main(prog_name="doc2json")
