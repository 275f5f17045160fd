from .codegen import TextBuffer
from .model import (
    Access, Writable, render,
    TSFile, TSInterface, TSClass, TSProperty, TSMethod, TSParameter,
)
from .types import (
    FileSpec, InterfaceSpec, ClassSpec, PropertySpec, MethodSpec, ParameterSpec,
    mk_file, mk_interface, mk_class, mk_property, mk_method, mk_parameter,
)
from .loader import ModelError, load_model, write_output

__all__ = [
    # buffer
    "TextBuffer",
    # model
    "Access", "Writable", "render",
    "TSFile", "TSInterface", "TSClass", "TSProperty", "TSMethod", "TSParameter",
    # model documents
    "FileSpec", "InterfaceSpec", "ClassSpec", "PropertySpec", "MethodSpec", "ParameterSpec",
    "mk_file", "mk_interface", "mk_class", "mk_property", "mk_method", "mk_parameter",
    # loading
    "ModelError", "load_model", "write_output",
]
