"""
The MODEL layer contains the data structures of a loaded bundle.
It deals with the payload record, the vector table and bundle I/O.
It has NO knowledge of the embedding operations built on top of it.
"""
