import sys

from folio.services.commit_checks import commit_message_main

if __name__ == "__main__":
    sys.exit(commit_message_main())
