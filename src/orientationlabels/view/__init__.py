"""
The VIEW layer connects the label model to the rendering engine (VTK / PyVista).
"""
