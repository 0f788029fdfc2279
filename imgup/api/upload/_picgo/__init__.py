"""PicGo / PicList upload backend."""
