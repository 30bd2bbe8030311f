"""Back-office login page."""

from html import escape

from backoffice.core.constants import GENERIC_LOGIN_ERROR


def render_login_page(
    app_name: str,
    action: str,
    *,
    error: bool = False,
    redirect_url: str | None = None,
) -> str:
    """Return HTML for the login form posting to action."""
    error_html = (
        f'<p class="error" role="alert">{escape(GENERIC_LOGIN_ERROR)}</p>' if error else ""
    )
    redirect_html = (
        f'<input type="hidden" name="redirect_url" value="{escape(redirect_url)}">'
        if redirect_url
        else ""
    )
    return f"""
<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>{escape(app_name)} - Sign in</title>
    <style>
        * {{ box-sizing: border-box; }}
        body {{
            font-family: system-ui, sans-serif;
            margin: 0;
            min-height: 100vh;
            display: flex;
            align-items: center;
            justify-content: center;
            background: #f4f6f8;
            color: #25303b;
        }}
        form {{
            width: 100%;
            max-width: 360px;
            background: #fff;
            padding: 2rem;
            border-radius: 6px;
            box-shadow: 0 1px 4px rgba(0, 0, 0, 0.12);
        }}
        h1 {{ font-size: 1.4rem; margin: 0 0 1.5rem 0; }}
        label {{ display: block; font-size: 0.9rem; margin-bottom: 0.3rem; }}
        input[type=email], input[type=password] {{
            width: 100%;
            padding: 0.6rem;
            margin-bottom: 1rem;
            border: 1px solid #bbcdd2;
            border-radius: 4px;
        }}
        .remember {{ display: flex; gap: 0.5rem; align-items: center; margin-bottom: 1.5rem; }}
        button {{
            width: 100%;
            padding: 0.7rem;
            border: 0;
            border-radius: 4px;
            background: #25b9d7;
            color: #fff;
            font-size: 1rem;
            cursor: pointer;
        }}
        .error {{ color: #c45c67; margin: 0 0 1rem 0; }}
    </style>
</head>
<body>
    <form method="post" action="{escape(action)}">
        <h1>{escape(app_name)}</h1>
        {error_html}
        <label for="email">Email address</label>
        <input type="email" id="email" name="email" autocomplete="username" required autofocus>
        <label for="password">Password</label>
        <input type="password" id="password" name="password" autocomplete="current-password" required>
        <div class="remember">
            <input type="checkbox" id="stay_logged_in" name="stay_logged_in" value="1">
            <label for="stay_logged_in">Stay logged in</label>
        </div>
        {redirect_html}
        <button type="submit">Log in</button>
    </form>
</body>
</html>
"""
