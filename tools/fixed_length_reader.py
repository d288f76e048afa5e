class FixedLengthReader:
    """
    Reads lines of fixed width text files column by column.
    Usage example:
    ```
    reader = FixedLengthReader([(79, 97, 'a', float), (97, 111, 'b', float), (111, 131, 'c', float)])
    a, b, c = reader.read(line)
    ```
    """
    def __init__(self, columns):
        """
        Each column is (start, end, name, field_type) where [start, end) is the
        character range and field_type is int, float or str. End can be None
        to read until the end of the line.
        """
        self.columns = self._check_columns(columns)

    @staticmethod
    def _check_columns(columns):
        checked = []
        for start, end, name, field_type in columns:
            if start < 0 or (end is not None and end <= start):
                raise ValueError(f'Invalid column range [{start},{end}) for field {name!r}.')
            if field_type not in (int, float, str):
                raise ValueError(f'Unsupported field type {field_type!r} for field {name!r}.')
            checked.append((start, end, name, field_type))
        return tuple(checked)

    @staticmethod
    def _convert(substring, field_type):
        if field_type == str:
            return substring.strip()
        if field_type == float:
            # Replace d with e (Fortran double)
            return float(substring.strip().replace('d', 'e').replace('D', 'e'))
        return field_type(substring.strip())

    def read(self, line):
        """
        Parse a line of text using the column table and return a list of parsed values.
        Raises ValueError if a field cannot be converted.
        """
        result = []
        for start, end, name, field_type in self.columns:
            substring = line[start:end]
            try:
                result.append(self._convert(substring, field_type))
            except ValueError:
                raise ValueError(f'Field {name!r} at [{start},{end}) is not {field_type.__name__}: {substring!r}')
        return result
