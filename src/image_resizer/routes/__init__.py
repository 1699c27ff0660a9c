"""HTTP routes: the tool page, its JSON API and the static site."""
