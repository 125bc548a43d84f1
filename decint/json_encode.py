import json


class JsonBigIntEncoder(json.JSONEncoder):
    """Custom converter for json_encode().  Anything with a .to_json() method gets it called."""

    def default(self, x):
        to_json = getattr(x, 'to_json', None)
        if callable(to_json):
            return to_json()
        return super().default(x)
        # NOTE:  The base class raises TypeError for anything else.


JSON_SEPARATORS_NO_SPACES = (',', ':')


def json_encode(x, **kwargs):
    """
    JSON encode, e.g. containers of BigInts.

        assert '{"n":"-120"}' == json_encode({'n': BigInt(-120)})

    BigInts become decimal strings, see BigInt.to_json().
    """
    kwargs.setdefault('separators', JSON_SEPARATORS_NO_SPACES)
    return json.dumps(x, cls=JsonBigIntEncoder, allow_nan=False, **kwargs)
