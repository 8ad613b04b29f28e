class ViewResult(object):
    """Result of view query; contains rows, offset, total_rows.
    Instances of this class are not supposed to be created by client software.
    """

    def __init__(self, rows, offset=None, total_rows=None, header=None):
        self.rows = rows
        self.offset = offset
        self.total_rows = total_rows
        self.header = header or {}

    def __len__(self):
        return len(self.rows)

    def __getitem__(self, i):
        return self.rows[i]

    def __iter__(self):
        return iter(self.rows)

    def __eq__(self, other):
        if isinstance(other, ViewResult):
            return self.rows == other.rows
        if isinstance(other, (list, tuple)):
            return self.rows == list(other)
        return NotImplemented

    def __repr__(self):
        return '<%s %d rows>' % (type(self).__name__, len(self.rows))

    def json(self):
        "Return data in a JSON-like representation."
        result = dict(self.header)
        result["total_rows"] = self.total_rows
        result["offset"] = self.offset
        result["rows"] = list(self.rows)
        return result
