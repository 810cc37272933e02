# Folder in charge of Hyrule Compendium API interactions
