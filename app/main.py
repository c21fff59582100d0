from server import server

server_app = server.create_app()
