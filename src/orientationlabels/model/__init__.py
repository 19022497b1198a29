"""
The MODEL layer contains pure data structures and the label logic.
It has NO knowledge of the rendering engine (VTK / PyVista).
It deals with vectors, cameras and orientation labels.
"""
