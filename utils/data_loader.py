import gzip

def load_text(path, size_limit=None):
    """Read a corpus, gzip-compressed when the name ends in .gz."""
    opener = gzip.open if str(path).endswith('.gz') else open
    with opener(path, 'rt', encoding='latin-1') as f:
        if size_limit:
            return f.read(size_limit)  # Read up to `size_limit` characters
        return f.read()  # Read the full text if no limit is provided
