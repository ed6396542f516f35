from dataclasses import fields, is_dataclass
from functools import lru_cache
from typing import List, Self, Tuple, Union, get_args, get_origin, get_type_hints
import types


@lru_cache(maxsize=None)
def _field_types(cls: type) -> dict:
    """
    Map of field name -> (is_list, resource class or None) from the dataclass annotations.
    Only resource valued fields need converting so anything else maps to None.
    """
    hints = get_type_hints(cls)
    out = {}
    for f in fields(cls):
        hint = hints.get(f.name, None)
        if get_origin(hint) in (Union, types.UnionType):
            args = [a for a in get_args(hint) if a is not type(None)]
            hint = args[0] if len(args) == 1 else None
        is_list = get_origin(hint) is list
        if is_list:
            hint = (get_args(hint) or (None,))[0]
        if not (isinstance(hint, type) and issubclass(hint, GoogleAPIResourceBase)):
            hint = None
        out[f.name] = (is_list, hint)
    return out


def _is_empty(v) -> bool:
    return v is None or (type(v) not in [int, bool, float] and not v)


class GoogleAPIResourceBase():
    """
    Base of every generated schema dataclass, intended to be subclassed by a dataclass but isnt one.
    Field names match the JSON property names so instances map directly to and from the
    dicts sent over the wire.  None is the unset value.
    Subclasses may define:
        _int64: names of int64/uint64 fields, strings in JSON and ints here
        _json_names: attribute -> JSON name where the JSON name isnt a valid identifier
    """
    _int64: Tuple[str, ...] = ()
    _json_names: dict = {}

    # set on resources decoded from a response, never serialised
    server_response = None

    def __post_init__(self) -> None:
        self.fixup()

    @classmethod
    def from_base(cls, data: dict|None) -> Self:
        """
        Build from a decoded JSON dict, ignoring any properties the schema doesn't know about
        as the server can add them at any time.
        """
        if not data:
            return cls()
        names = {v: k for k, v in cls._json_names.items()}
        known = {f.name for f in fields(cls)}
        kwargs = {}
        for k, v in data.items():
            k = names.get(k, k)
            if k in known:
                kwargs[k] = v
        return cls(**kwargs)

    def fixup(self) -> None:
        """
        Convert nested dicts into their resource classes and int64 strings into ints.
        Subclasses doing their own field adjustments should call this too.
        """
        if not is_dataclass(self):
            return
        for name, (is_list, rcls) in _field_types(type(self)).items():
            v = getattr(self, name)
            if v is None:
                continue
            if rcls is not None:
                if is_list and isinstance(v, list):
                    setattr(self, name, [rcls.from_base(i) if isinstance(i, dict) else i for i in v])
                elif isinstance(v, dict):
                    setattr(self, name, rcls.from_base(v))
            elif name in self._int64:
                if isinstance(v, list):
                    setattr(self, name, [int(i) if isinstance(i, str) else i for i in v])
                elif isinstance(v, str):
                    setattr(self, name, int(v))

    def to_base(self) -> dict:
        """
        The JSON ready dict representation, every field included.
        Nested resources become dicts and int64 fields strings, as the API expects.
        """
        self.fixup()
        b = {}
        for f in fields(self):
            b[self._json_names.get(f.name, f.name)] = self._encode(f.name, getattr(self, f.name))
        return b

    def _encode(self, name: str, v):
        if isinstance(v, GoogleAPIResourceBase):
            return v.to_base()
        if isinstance(v, list):
            return [self._encode(name, i) for i in v]
        if isinstance(v, dict):
            return {k: self._encode(name, i) for k, i in v.items()}
        if name in self._int64 and type(v) is int:
            return str(v)
        return v

    def force_send(self, *names: str) -> Self:
        """
        Fields to send even when empty, e.g. to clear a list or string with a patch.
        Fields still None are never sent.
        """
        known = {f.name for f in fields(self)}
        for n in names:
            if n not in known:
                raise ValueError(f"{self.__class__.__name__} has no field: {n}")
        self._force_send = tuple(getattr(self, '_force_send', ())) + tuple(names)
        return self

    @property
    def force_send_fields(self) -> Tuple[str, ...]:
        return tuple(getattr(self, '_force_send', ()))

    def trim(self) -> dict:
        """
        Return a 'trimmed' dict of the resource, as used for request bodies.  That is, removing
        any attributes, at every level, that are None or empty.  Empty means a string or container,
        0 and False are real values.  Fields named with force_send() are kept when empty.
        """
        b = {}
        forced = self.force_send_fields
        for f in fields(self):
            key = self._json_names.get(f.name, f.name)
            v = getattr(self, f.name)
            if isinstance(v, GoogleAPIResourceBase):
                v = v.trim()
            elif isinstance(v, list):
                v = [i.trim() if isinstance(i, GoogleAPIResourceBase) else self._encode(f.name, i) for i in v]
            else:
                v = self._encode(f.name, v)
            if v is None or (_is_empty(v) and f.name not in forced):
                continue
            b[key] = v
        return b

    def update_fields(self, **kwargs) -> List[str]:
        """
        Update fields that may be present, skipping None values.
        """
        updated_fields = []
        if is_dataclass(self):
            flist = fields(self)
            for k, v in kwargs.items():
                for f in flist:
                    if v is not None and k == f.name:
                        setattr(self, k, v)
                        updated_fields.append(k)
            self.fixup()
        return updated_fields
