"""Chat command helpers: secret guardrail, config diffs and Gosuto content handling."""