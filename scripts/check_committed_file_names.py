import sys

from folio.services.commit_checks import file_names_main

if __name__ == "__main__":
    sys.exit(file_names_main())
