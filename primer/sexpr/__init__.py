"""Namespace for S-expression support; it holds no modules yet."""