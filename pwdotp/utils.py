from itertools import zip_longest # for Python 3.x
def split_by_n(iterable, n):
    return list(zip_longest(*[iter(iterable)]*n, fillvalue=''))

def group(text, n=4, sep=' '):
    # base32.decode() drops the separators again
    return sep.join(''.join(chunk) for chunk in split_by_n(text, n))
