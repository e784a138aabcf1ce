"""robots_warden.crawler: Загрузка robots.txt и фасад RobotsParser."""
