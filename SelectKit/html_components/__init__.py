from SelectKit.html_components.HTMLComponent import HTMLComponent
