# topmark:header:start
#
#   project      : PipeSeq
#   file         : __init__.py
#   file_relpath : src/pipeseq/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click-based command line interface for PipeSeq."""
