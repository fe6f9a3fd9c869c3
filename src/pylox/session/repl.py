# Copyright 2026 pylox Contributors
# SPDX-License-Identifier: Apache-2.0

"""Interactive read loop: prompt, scan one line, print its tokens."""

from __future__ import annotations

import sys
from typing import TextIO

from pylox.session.session import Session, render_tokens


def run_prompt(session: Session, stdin: TextIO | None = None, stdout: TextIO | None = None) -> None:
    """Run the interactive loop until end of input.

    Each line is scanned on its own. Lexical errors are reported and the
    error flag is cleared before the next prompt, so a bad line never ends
    the session.
    """
    stdin = stdin if stdin is not None else sys.stdin
    stdout = stdout if stdout is not None else sys.stdout

    while True:
        stdout.write(session.config.prompt)
        stdout.flush()
        line = stdin.readline()
        if not line:
            stdout.write("\n")
            return
        tokens = session.run(line.rstrip("\n"))
        print(render_tokens(tokens, session.config.output_format), file=stdout)
        session.reset()
