"""Record type definitions for IGC files."""

class RecordType:
    """Constants for the record tags the decoder acts on."""
    A = ord('A')  # manufacturer and logger id
    H = ord('H')  # file header
    B = ord('B')  # fix
    C = ord('C')  # task declaration and turnpoints
