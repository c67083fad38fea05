# When STRICT is False, short files are zero-padded to a full block
# instead of raising TruncatedInput.
STRICT = True
