"""Core constants: cache key prefixes, route names and security literals."""

# Cache key prefix for resolved employee principals
CACHE_PREFIX_EMPLOYEE = "employee"

# Delimiter for composite keys
CACHE_KEY_SEP = ":"

# Route name of the login form endpoint; the authenticator only handles POSTs to it.
LOGIN_ROUTE = "_admin_login"

# Role granted to every authenticated employee.
ROLE_EMPLOYEE = "ROLE_EMPLOYEE"

# Shown for every failed login (unknown email, wrong password, invalid form).
GENERIC_LOGIN_ERROR = "Invalid email or password"
